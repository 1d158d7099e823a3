"""shared record fixtures for the pollect suites."""

# --- dgen schemas ---

product_schema = {
    'id': {'_gen_provider': 'sequence', 'start': 100, 'step': 50},
    'product': {'_gen_provider': 'choice', 'from': ['Chair', 'Desk', 'Lamp', 'Bookcase']},
    'manufacturer': {'_gen_provider': 'choice', 'from': ['IKEA', 'Herman Miller', 'Steelcase']},
    'price': ('pyint', {'min_value': 50, 'max_value': 2000}),
    'in_stock': ('pybool', {}),
}

player_schema = {
    'name': 'name',
    'number': ('pyint', {'min_value': 1, 'max_value': 99}),
    'club': {'_gen_provider': 'choice', 'from': ['Liverpool', 'Everton', 'Arsenal']},
    'email': {'_gen_provider': 'ref', 'key': 'number', 'format': 'player{}@example.com'},
}


# --- literal datasets ---

def products():
    return [
        {'id': 100, 'product': 'Chair', 'manufacturer': 'IKEA', 'price': '1490 NOK'},
        {'id': 150, 'product': 'Desk', 'manufacturer': 'IKEA', 'price': '900 NOK'},
        {'id': 200, 'product': 'Chair', 'manufacturer': 'Herman Miller', 'price': '9990 NOK'},
    ]


def priced_products():
    return [
        {'product': 'Desk', 'price': 200},
        {'product': 'Chair', 'price': 100},
        {'product': 'Bookcase', 'price': 150},
        {'product': 'Door', 'price': '100'},
    ]


def player():
    return {'name': 'Steven Gerrard', 'number': 8}
