"""Test suite for quicklaunch."""
