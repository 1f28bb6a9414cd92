"""
Art Visualizer

Upload a photo of a room and get back a generated image with artwork on the wall:
- services: art catalog, data URL handling, prompts and Gemini orchestration
- routers: the HTTP API
- static: the browser client
"""

__version__ = "1.0.0"
