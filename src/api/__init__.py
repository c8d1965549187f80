"""API: camada de borda e adapters externos.

Responsabilidades:
- Receber o webhook do Kontent.ai e validar a assinatura
- Ler conteúdo da Delivery API
- Enviar batches ao Recombee

Subpastas:
- connectors/: adapters HTTP/SDK por integração
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: regras de roteamento de notificações nem mapeamento de conteúdo.
"""
