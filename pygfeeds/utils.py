# -*- coding: utf-8 -*-

"""
pygfeeds.utils
~~~~~~~~~~~~~~

This module contains utility functions.

"""

import copy
from functools import wraps
import logging
import re
from xml.etree import ElementTree

ATOM_NS = 'http://www.w3.org/2005/Atom'
GS_NS = 'http://schemas.google.com/spreadsheets/2006'
GSX_NS = 'http://schemas.google.com/spreadsheets/2006/extended'

# namespace uri -> prefix used for keys of the parsed tree, atom elements are unprefixed
NAMESPACE_PREFIXES = {
    ATOM_NS: '',
    GS_NS: 'gs',
    GSX_NS: 'gsx',
    'http://schemas.google.com/g/2005': 'gd',
    'http://schemas.google.com/gdata/batch': 'batch',
    'http://a9.com/-/spec/opensearchrss/1.0/': 'openSearch',
    'http://a9.com/-/spec/opensearch/1.1/': 'openSearch',
}

TEXT_KEY = '_'
ATTRIBUTES_KEY = '$'

_column_name_re = re.compile(r'[\s_]+')

logger = logging.getLogger(__name__)


def xml_safe_value(value):
    """Escape a value for use as element text or as a double quoted attribute.

    >>> xml_safe_value('a < b & "c"')
    'a &lt; b &amp; &quot;c&quot;'
    >>> xml_safe_value(None)
    ''
    """
    if value is None:
        return ''
    return (str(value).replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace('"', '&quot;')
            .replace('\n', '&#10;')
            .replace('\r', '&#13;')
            .replace('\t', '&#9;'))


def xml_safe_column_name(name):
    """Column header as the feed names it: whitespace and underscores dropped, lower case.

    >>> xml_safe_column_name('First Name')
    'firstname'
    """
    if not name:
        return ''
    return _column_name_re.sub('', str(name)).lower()


def qualified_name(tag):
    """Turn an ElementTree '{uri}local' name into 'prefix:local' for the known feed namespaces."""
    if tag.startswith('{'):
        uri, local = tag[1:].split('}', 1)
        if uri in NAMESPACE_PREFIXES:
            prefix = NAMESPACE_PREFIXES[uri]
            return prefix + ':' + local if prefix else local
    return tag


def to_feed_xml(element):
    """Serialize an element with the feed prefixes (gsx, gs, ...) declared on its root.

    Atom elements go into the default namespace unless the tree holds elements without a namespace, then they are
    written as 'atom:'.
    """
    element = copy.deepcopy(element)
    nodes = [node for node in element.iter() if isinstance(node.tag, str)]
    unqualified = any(not node.tag.startswith('{') for node in nodes)

    used = {}

    def rename(name):
        if not name.startswith('{'):
            return name
        uri, local = name[1:].split('}', 1)
        if uri not in NAMESPACE_PREFIXES:
            return name
        prefix = NAMESPACE_PREFIXES[uri] or ('atom' if unqualified else '')
        used[prefix] = uri
        return prefix + ':' + local if prefix else local

    for node in nodes:
        node.tag = rename(node.tag)
        for key in list(node.attrib):
            new_key = rename(key)
            if new_key != key:
                node.attrib[new_key] = node.attrib.pop(key)

    for prefix, uri in sorted(used.items()):
        element.set('xmlns:' + prefix if prefix else 'xmlns', uri)
    return ElementTree.tostring(element, encoding='unicode')


def element_to_dict(element):
    """Convert an element into a generic attribute/text tree.

    An element without attributes and children becomes its text (None when empty). Otherwise it becomes a dict
    with the text under '_', the attributes under '$' and every child under its qualified name. Children are
    always collected in lists, even when an element occurs once.
    """
    attributes = dict((qualified_name(k), v) for k, v in element.attrib.items())
    children = list(element)
    text = element.text
    if not attributes and not children:
        return text or None

    node = {}
    if attributes:
        node[ATTRIBUTES_KEY] = attributes
    if text and (not children or text.strip()):
        node[TEXT_KEY] = text
    for child in children:
        node.setdefault(qualified_name(child.tag), []).append(element_to_dict(child))
    return node


def first(tree, key):
    """First child named key of a parsed tree node or None."""
    values = tree.get(key)
    if values:
        return values[0]
    return None


def node_text(node):
    """Text of a parsed tree node."""
    if isinstance(node, dict):
        return node.get(TEXT_KEY)
    return node


def parse_links(link_nodes):
    """Map the rel of each link node to its href."""
    links = {}
    for link in link_nodes or []:
        attributes = link.get(ATTRIBUTES_KEY, {})
        if 'rel' in attributes:
            links[attributes['rel']] = attributes.get('href')
    return links


def query_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return value


def completable(func):
    """Let a method report to an optional `callback` keyword argument.

    Without a callback the method returns its result and raises its errors. With one, `callback(error, result)`
    is called once: with the error and None if the call failed, with None and the result otherwise.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        callback = kwargs.pop('callback', None)
        if callback is None:
            return func(*args, **kwargs)
        try:
            result = func(*args, **kwargs)
        except Exception as error:
            logger.debug('%s failed, passing %r to callback', func.__name__, error)
            callback(error, None)
            return None
        callback(None, result)
        return result
    return wrapper
