# Colores por nivel de estado (nombres de color de markdown de Streamlit)
STATUS_TIER_COLORS = {
    "warning": "orange",
    "primary": "blue",
    "success": "green",
    "neutral": "gray",
}

PHOTO_PLACEHOLDER_HEIGHT = 200
