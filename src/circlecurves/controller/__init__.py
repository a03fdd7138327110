"""
The CONTROLLER layer connects Qt events to the puzzle model and tells the
views when to refresh.
"""
