"""
Shared utilities: Rich-backed logging, answer source extraction and README editing.
"""
