"""Output layer: Rich rendering and JSON formatting of ServiceResult."""
