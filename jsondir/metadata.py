"""jsondir package metadata."""

version = '1.0.0'
