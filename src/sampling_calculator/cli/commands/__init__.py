"""
CLI Commands Module

Command groups registered on the main application:

- presets: Save, list, show, and delete named telescope, camera, and rig presets
"""
