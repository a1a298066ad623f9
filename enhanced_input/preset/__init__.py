"""Base class for presets that group several bindings for one action."""