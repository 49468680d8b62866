"""Command line tool for kustomize-deps."""
