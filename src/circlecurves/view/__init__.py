"""
The VIEW layer draws the puzzle and the number grids with Qt.
"""
