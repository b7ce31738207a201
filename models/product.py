"""Product and product image models."""

from . import db


class Product(db.Model):
    """An item an entrepreneur offers for sale."""

    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    entrepreneur_id = db.Column(
        db.Integer, db.ForeignKey("users.id"), nullable=False, index=True
    )
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    price = db.Column(db.Float, nullable=False)
    # Single thumbnail kept for clients that predate ProductImage.
    image_url = db.Column(db.String(512), nullable=True)

    images = db.relationship(
        "ProductImage",
        back_populates="product",
        order_by="ProductImage.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def image_urls(self) -> list[str]:
        """Return the gallery, falling back to the legacy thumbnail."""

        urls = [image.image_url for image in self.images]
        if urls:
            return urls
        return [self.image_url] if self.image_url else []

    def to_dict(self) -> dict:
        """Serialize the product, including its resolved image list."""

        return {
            "id": self.id,
            "entrepreneur_id": self.entrepreneur_id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "image_url": self.image_url,
            "images": self.image_urls(),
        }


class ProductImage(db.Model):
    """One image in a product's gallery."""

    __tablename__ = "product_images"

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(
        db.Integer,
        db.ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    image_url = db.Column(db.String(512), nullable=False)

    product = db.relationship("Product", back_populates="images")
