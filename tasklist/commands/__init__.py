"""
Argparse commands registered by tasklist.__main__.
"""
