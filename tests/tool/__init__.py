"""Tests for the kustomize-deps command line tool."""
