"""DevFlow CLI — install DevFlow agents, configuration and docs into a project."""

__version__ = "0.1.0"
