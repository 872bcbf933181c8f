"""ux-toolkit command-line interface."""
