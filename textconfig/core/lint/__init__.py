"""Line-level diagnostics for config files."""
