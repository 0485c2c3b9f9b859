"""
The VIEW layer hosts the model inside PySide6 widgets.
"""
