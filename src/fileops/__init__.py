"""fileops: bulk copy/move/delete through the host shell's file operations."""

__version__ = "1.0.0"
