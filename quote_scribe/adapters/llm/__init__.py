from .openrouter_client import OpenRouterClient, clean_quote, extract_text

__all__ = ["OpenRouterClient", "clean_quote", "extract_text"]
