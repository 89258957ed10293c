"""UI layer for quasirand.

- cli: Command-line demonstration (use the quasirand command or python -m quasirand.ui.cli)
"""
