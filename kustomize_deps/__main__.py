"""Run the kustomize-deps command line tool with `python -m kustomize_deps`."""

from kustomize_deps.tool.kustomize_deps import main

if __name__ == "__main__":
    main()
