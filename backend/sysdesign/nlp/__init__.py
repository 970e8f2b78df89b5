from sysdesign.nlp.text_parser import parse_text

__all__ = ["parse_text"]
