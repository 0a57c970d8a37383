"""
Gemini Gateway package.

Provides:
- A FastAPI gateway forwarding text, image, document and audio prompts to Gemini
- A uvicorn launcher for serving it on a fixed port
"""
