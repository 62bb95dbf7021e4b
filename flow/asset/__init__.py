"""Background asset loading through extension-based loaders and handles."""

__all__ = ["server"]