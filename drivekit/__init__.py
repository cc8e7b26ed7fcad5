"""Drive control, odometry, simulated devices and UI components for competition robots."""

__version__ = "0.1.0"