#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from payoff_app.config.loader import ConfigLoader
from payoff_app.config.validation import ConfigValidator


def main():
    """Validate config/payoff.yaml merged over the defaults."""
    loader = ConfigLoader.create()
    config_file = loader.config_dir / "payoff.yaml"
    print(f"🔍 Validating {config_file}...")

    try:
        config = loader.load_config()
    except Exception as e:
        print(f"❌ Could not load configuration: {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value!r})")
        sys.exit(1)

    grid = config["grid"]
    print(f"✅ Grid: margin={grid['margin']} step={grid['step']}")
    print(f"✅ Curve: precision={config['curve']['precision']}")
    print("\n🎉 Configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
