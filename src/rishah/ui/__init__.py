"""
UI module - Qt window, native dialogs and the web channel object.
"""
