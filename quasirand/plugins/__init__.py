"""Plugin packages for quasirand."""
