"""
Built-in product inventory served when no products file is configured.
"""

from typing import Dict

from .models import Product, Property


INVENTORY: Dict[str, Product] = {
    "1": Product(
        id="1",
        type="Coffee",
        brand="Segafredo",
        name="Intermezzo",
        unit="gram",
        quantity="1000",
        price="7.99",
        properties=[
            Property(name="flavour", value="Acidic Robusta, Nuts, Aromatic Arabica, Caramel, Medium roasted beans"),
            Property(name="property", value="1000 grams, Arabica/Robusta"),
            Property(name="intensity", value=""),
        ],
    ),
    "2": Product(
        id="2",
        type="Coffee",
        brand="Segafredo",
        name="Caffé Crema Gustoso",
        unit="gram",
        quantity="1000",
        price="11.99",
        properties=[
            Property(name="flavour", value="Acidic Robusta, Nuts, Aromatic Arabica, Medium roasted beans"),
            Property(name="property", value="1000 grams, Arabica/Robusta"),
            Property(name="intensity", value="Medium (6/10)"),
        ],
    ),
    "3": Product(
        id="3",
        type="Coffee",
        brand="Segafredo",
        name="Selezione Espresso",
        unit="gram",
        quantity="1000",
        price="10.49",
        properties=[
            Property(name="flavour", value="Dark Chocolate, Acidic Robusta, Dark roasted beans, Aromatic Arabica"),
            Property(name="property", value="1000 grams, Arabica/Robusta"),
        ],
    ),
    "4": Product(
        id="4",
        type="Coffee",
        brand="illy",
        name="Intenso",
        unit="gram",
        quantity="250",
        price="7.99",
        properties=[
            Property(name="flavour", value="Fruit, Chocolate, Dark roasted beans, Bitterness"),
            Property(name="property", value="250 grams, Arabica"),
            Property(name="intensity", value="Very strong (9/10)"),
        ],
    ),
    "5": Product(
        id="5",
        type="Coffee",
        brand="illy",
        name="Guatemala",
        unit="gram",
        quantity="250",
        price="7.99",
        properties=[
            Property(name="flavour", value="Honey, Caramel, Sweetness"),
            Property(name="property", value="250 gram, Arabica"),
            Property(name="intensity", value="Medium (6/10)"),
        ],
    ),
    "6": Product(
        id="6",
        type="Coffee",
        brand="Lavazza",
        name="Espresso Barista Perfetto",
        unit="gram",
        quantity="1000",
        price="12.99",
        properties=[
            Property(name="flavour", value="Aromatic Arabica, Medium roasted beans"),
            Property(name="property", value="250 gram, Arabica"),
            Property(name="intensity", value="Medium (6/10)"),
        ],
    ),
    "7": Product(
        id="7",
        type="Tea",
        brand="Caykur",
        name="Green Tea",
        unit="gram",
        quantity="150",
        price="4.99",
    ),
    "8": Product(
        id="8",
        type="Tea",
        brand="Greeting Opine",
        name="Jasmin Tea",
        unit="gram",
        quantity="250",
        price="7.49",
    ),
}
