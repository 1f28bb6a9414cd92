"""
Domain services: art catalog, data URLs, prompts and Gemini orchestration.
"""
