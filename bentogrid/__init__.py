"""Bento grid generator — tiles a rectangular container with spanning cells."""
