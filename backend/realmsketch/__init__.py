"""RealmSketch: prompt-driven scene generation for the world builder."""

__version__ = "0.1.0"
