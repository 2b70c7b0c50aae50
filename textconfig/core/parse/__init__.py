"""Line splitting for the `key = value` format."""
