"""Pure domain logic: parsing, path resolution, errors. No I/O."""
