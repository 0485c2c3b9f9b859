"""
The MODEL layer contains pure data structures and drawing logic.
It has NO knowledge of the GUI (Qt).
It deals with outline geometry and the progress bar state.
"""
