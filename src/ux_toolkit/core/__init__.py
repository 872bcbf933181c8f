"""Path resolution, manifest, installer and status engine."""
