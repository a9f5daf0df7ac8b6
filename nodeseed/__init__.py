"""nodeseed — bootstrap a JavaScript project with its tooling."""

__version__ = "0.1.0"
