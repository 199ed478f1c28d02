from .cnab240_writer import Cnab240Writer, build_line, format_amount, format_date, pad_number, pad_text
__all__ = ['Cnab240Writer', 'build_line', 'format_amount', 'format_date', 'pad_number', 'pad_text']
