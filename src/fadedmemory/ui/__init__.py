"""Gradio browser UI for the Faded Memory Generator."""
