"""
Lambda entrypoint (handler configurado como lambda_function.lambda_handler)
Roteamento e tratamento de erros ficam no adapter HTTP
"""
from infrastructure.adapters.input.lambda_handler import lambda_handler

__all__ = ['lambda_handler']
