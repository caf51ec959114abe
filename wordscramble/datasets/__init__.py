from .validator import validate_wordlist, pretty_summary

__all__ = ["validate_wordlist", "pretty_summary"]
