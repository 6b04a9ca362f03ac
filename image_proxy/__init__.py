"""
Florio Image Proxy: прокси для загрузки изображений со сторонних CDN
"""
__version__ = "1.0.0"
