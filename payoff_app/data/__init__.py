"""
Contract ingestion and normalization module.

Converts raw option-chain records into editable contract drafts and parses
drafts once into strongly typed, complete contracts.
"""
