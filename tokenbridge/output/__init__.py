"""Write paths from normalized tokens to design tools."""
