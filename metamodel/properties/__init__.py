from .markers import Id, Transient
from .property import MemberKind, Property, PropertyShape
from .property_scanner import AccessorPropertyScanner, FieldPropertyScanner, PropertyScanner, scanner_for
