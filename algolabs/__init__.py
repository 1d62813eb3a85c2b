"""Classic algorithms and data structures: sorting, closest pair, red-black and
interval trees, LCS, Huffman coding and job scheduling, with command-line tools."""

__version__ = "0.1.0"