"""HTTP surface for presentation clients."""
