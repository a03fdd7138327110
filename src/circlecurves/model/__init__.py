"""
The MODEL layer contains pure data structures and puzzle rules.
It has NO knowledge of the GUI (Qt).
It deals with Geometry, Curve generation, Numbering and Pairing.
"""
