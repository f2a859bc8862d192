"""Presentation layer: public call interfaces."""
