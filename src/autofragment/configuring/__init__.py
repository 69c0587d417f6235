"""Settings of autofragment, layered from YAML files."""
