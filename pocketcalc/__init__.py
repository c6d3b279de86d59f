"""pocketcalc — Immediate-execution pocket calculator engine.

Feed it key presses one at a time and it keeps a single running value, the
way a desk calculator does: every operator press evaluates what is pending,
left to right, with no precedence.

Usage:
    python -m pocketcalc press 12+3=          # Press keys, show the display
    python -m pocketcalc trace 2+3*4=         # State after every key
    python -m pocketcalc keys                 # Key bindings
    python -m pocketcalc repl                 # Interactive session
"""

__version__ = "0.1.0"
