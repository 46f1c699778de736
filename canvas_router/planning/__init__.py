# canvas_router/planning/__init__.py
