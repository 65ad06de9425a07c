"""
pymidas: fine-grained isotopic distributions of molecular compositions.
"""
__version__ = '0.1.0'
