"""
Spellcaster - Minimum-mana combat optimizer

A deterministic search engine for a turn-based wizard-versus-boss fight.
The engine takes the boss's stats and provides:
- Timed effect handling (Shield, Poison, Recharge)
- Immutable combat states
- Legal transition generation
- Uniform-cost search for the cheapest win
"""

__version__ = "0.1.0"
