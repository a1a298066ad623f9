"""Modifiers that transform action values: clamping, dead zones, scaling, negation, swizzling, smoothing and accumulation."""