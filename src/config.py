"""
Configuration settings for the ray tracer
"""

# Rendering settings
RENDER_SETTINGS = {
    'width': 320,            # height is derived from the camera aspect ratio
    'max_depth': 100,        # mirror bounces followed per camera ray
    'epsilon': 1e-4,         # offset for rays leaving a surface
    'workers': 1,            # processes rendering rows in parallel
    'chunk_rows': 16,        # rows handed to a worker at a time
    'channel_policy': 'clamp',  # 'clamp' or 'wrap' (keep the low byte)
}

# Display settings
DISPLAY_SETTINGS = {
    'caption': "Ray Tracer",
    'max_window_width': 1280,
    'max_window_height': 720,
}
