"""Interactive SQL Visualizer — catalog, rendering, playback and AI explainer."""
