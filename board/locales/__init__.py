"""Locale package for the packaged message catalog.

Each ``<code>.json`` file maps message keys to the text for that locale. The
files are read through importlib.resources, so this must stay a real package
for them to be found both from a checkout and from an installed wheel.
"""
