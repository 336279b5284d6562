"""Code generation: output nodes, printing, and project file emission."""
