"""
Semantic type aliases for streamslice datastructures.

This module provides meaningful type aliases that make the slicing code more
self-documenting by replacing raw int, str and bytes with semantic aliases.
"""

# Offsets and positions, measured in units (bytes or lines)
type UnitOffset = int
type UnitPosition = int
type UnitCount = int

# Raw byte measurements
type ByteCount = int
type ByteValue = int
type ChunkSize = int

# Textual inputs
type RangeText = str
type InputPath = str
