"""
Command line tools of the genesis generator.
"""
