"""
Встроенные данные эмодзи (emoji.json)
"""
