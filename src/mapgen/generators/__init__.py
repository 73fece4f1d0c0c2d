"""
Map generators: base area, block partitioning, trunks, gates, room packing,
room connectivity and the fixed train layout.
"""
