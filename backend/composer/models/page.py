from composer.extensions import db
from .base import BaseModel

class Page(BaseModel):
    __tablename__ = 'pages'

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    status = db.Column(db.String(50), default='draft', index=True)  # draft | published | archived
    template = db.Column(db.String(100), default='default')
    seo = db.Column(db.JSON(none_as_null=True), default=dict)

    # Ordered composition in wire shape: [{id, sectionId, props, customClasses?}]
    sections = db.Column(db.JSON, nullable=False, default=list)
