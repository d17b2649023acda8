from .options_writer import format_option, link_option, linkoffline_option, quote_option, write_options
from .properties_writer import format_properties, format_xml_properties, write_properties

__all__ = [
    "format_option",
    "format_properties",
    "format_xml_properties",
    "link_option",
    "linkoffline_option",
    "quote_option",
    "write_options",
    "write_properties",
]
