"""Discriminator map domain: descriptors, ports and the resolution pipeline."""
