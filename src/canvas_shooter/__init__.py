"""Headless arcade shooter simulation with animated replays."""
