"""Conectores externos: Kontent.ai (fonte de conteúdo) e Recombee (destino)."""
