"""Action values, input modifiers, a binding preset base class and state-driven context activation."""

__version__ = "0.24.2"