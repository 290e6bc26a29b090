"""Application – use-case level adapters built on top of :mod:`flagmask.mask`."""
