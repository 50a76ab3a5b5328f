"""Infrastructure layer: garage factories and builders."""
