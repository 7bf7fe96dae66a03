"""Field normalizers and the JSON-LD recipe parser."""
