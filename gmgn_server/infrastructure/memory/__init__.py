"""In-process repositories; all state vanishes on restart."""
