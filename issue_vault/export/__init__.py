"""Issue export pipeline: fetch, index, name, render and write."""
