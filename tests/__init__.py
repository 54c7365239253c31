"""
Test suite for alternating-disks

Contains:
- tests/unit/          : Unit tests for individual modules
"""
