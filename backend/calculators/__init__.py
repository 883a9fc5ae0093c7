"""
Tuning calculation engine.

Pure Python math. No I/O, no state between calls.
Given raw form fields (text or numbers), normalize them, apply one closed-form
formula and return a CalculatorResult dict.
"""
