from .teg_format import TEGFormat
