"""Tool configuration: settings, manifest discovery, logging."""
