"""
App Subpackage

This package contains the terminal side of the drills:
    - cli.py: Menu loop, single-game mode and JSON dump (argparse)
    - staff.py: ASCII treble staff for the note reading drill

The quiz engine in theory_drill.rules never reads or prints; cli.py
reads one line per answer, hands it to the quiz and prints the verdict.

Usage options:
    - CLI: theory-drill
    - Module: python -m theory_drill.app.cli --game 4
"""
