"""
Утилиты: конфигурация, логирование, исключения, HTML
"""
