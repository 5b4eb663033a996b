# backend/app/templates/catalog.py
"""
Template Catalog - Pre-built React components

Each entry pairs a component with its stylesheet. Order of
TEMPLATE_CATALOG is the keyword matching priority.
"""

from app.generation.artifact import Artifact
from app.templates.registry import (
    ComponentTemplate,
    TemplateCategory,
    TemplateRegistry,
)


# ============================================================
# VEHICLE
# ============================================================

CAR_JSX = """import React from 'react';

const Car = ({ model, color = 'red', speed = 'fast' }) => {
  return (
    <div className="car">
      <div className="car-body">
        <div className="car-top"></div>
        <div className="car-bottom">
          <div className="car-wheel car-wheel-front"></div>
          <div className="car-wheel car-wheel-back"></div>
        </div>
      </div>
      <div className="car-details">
        <h3 className="car-model">{model || 'Sports Car'}</h3>
        <p className="car-specs">Color: {color} | Speed: {speed}</p>
      </div>
    </div>
  );
};

export default Car;"""

CAR_CSS = """.car {
  display: flex;
  flex-direction: column;
  align-items: center;
  gap: 20px;
  padding: 20px;
}

.car-body {
  position: relative;
  width: 200px;
  height: 80px;
  background: linear-gradient(45deg, #ff4444, #cc0000);
  border-radius: 40px 40px 20px 20px;
  box-shadow: 0 8px 16px rgba(0,0,0,0.3);
}

.car-top {
  position: absolute;
  top: -20px;
  left: 50%;
  transform: translateX(-50%);
  width: 120px;
  height: 40px;
  background: linear-gradient(45deg, #ff6666, #ff4444);
  border-radius: 20px 20px 0 0;
  border: 2px solid #cc0000;
}

.car-bottom {
  position: relative;
  width: 100%;
  height: 100%;
}

.car-wheel {
  position: absolute;
  bottom: -15px;
  width: 30px;
  height: 30px;
  background: #333;
  border-radius: 50%;
  border: 3px solid #666;
  box-shadow: inset 0 0 8px rgba(0,0,0,0.5);
}

.car-wheel-front {
  left: 20px;
}

.car-wheel-back {
  right: 20px;
}

.car-details {
  text-align: center;
}

.car-model {
  margin: 0 0 8px 0;
  font-size: 18px;
  font-weight: bold;
  color: #333;
}

.car-specs {
  margin: 0;
  font-size: 14px;
  color: #666;
}

/* Car variants */
.car.sports {
  transform: scale(1.1);
}

.car.luxury .car-body {
  background: linear-gradient(45deg, #daa520, #ffd700);
}

.car.electric .car-body {
  background: linear-gradient(45deg, #00ff00, #00cc00);
}"""

CAR_TEMPLATE = ComponentTemplate(
    id="car",
    name="Car",
    category=TemplateCategory.VEHICLE,
    artifact=Artifact(jsx=CAR_JSX, css=CAR_CSS),
    keywords=["car", "vehicle", "automobile"],
)


# ============================================================
# BUTTON
# ============================================================

BUTTON_JSX = """import React from 'react';

const Button = ({ children, onClick, variant = 'primary' }) => {
  return (
    <button
      className={`btn btn-${variant}`}
      onClick={onClick}
    >
      {children}
    </button>
  );
};

export default Button;"""

BUTTON_CSS = """.btn {
  padding: 12px 24px;
  border: none;
  border-radius: 6px;
  font-size: 16px;
  font-weight: 500;
  cursor: pointer;
  transition: all 0.2s ease;
}

.btn-primary {
  background-color: #3b82f6;
  color: white;
}

.btn-primary:hover {
  background-color: #2563eb;
  transform: translateY(-1px);
}

.btn-secondary {
  background-color: #6b7280;
  color: white;
}

.btn-secondary:hover {
  background-color: #4b5563;
}

.btn-success {
  background-color: #10b981;
  color: white;
}

.btn-success:hover {
  background-color: #059669;
}"""

BUTTON_TEMPLATE = ComponentTemplate(
    id="button",
    name="Button",
    category=TemplateCategory.BUTTON,
    artifact=Artifact(jsx=BUTTON_JSX, css=BUTTON_CSS),
    keywords=["button", "btn"],
)


# ============================================================
# CARD
# ============================================================

CARD_JSX = """import React from 'react';

const Card = ({ title, content, image }) => {
  return (
    <div className="card">
      {image && (
        <div className="card-image">
          <img src={image} alt={title} />
        </div>
      )}
      <div className="card-content">
        <h3 className="card-title">{title}</h3>
        <p className="card-text">{content}</p>
      </div>
    </div>
  );
};

export default Card;"""

CARD_CSS = """.card {
  background: white;
  border-radius: 12px;
  box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
  overflow: hidden;
  transition: transform 0.2s ease, box-shadow 0.2s ease;
}

.card:hover {
  transform: translateY(-4px);
  box-shadow: 0 8px 25px rgba(0, 0, 0, 0.15);
}

.card-image {
  width: 100%;
  height: 200px;
  overflow: hidden;
}

.card-image img {
  width: 100%;
  height: 100%;
  object-fit: cover;
}

.card-content {
  padding: 20px;
}

.card-title {
  margin: 0 0 12px 0;
  font-size: 20px;
  font-weight: 600;
  color: #1f2937;
}

.card-text {
  margin: 0;
  color: #6b7280;
  line-height: 1.6;
}"""

CARD_TEMPLATE = ComponentTemplate(
    id="card",
    name="Card",
    category=TemplateCategory.CARD,
    artifact=Artifact(jsx=CARD_JSX, css=CARD_CSS),
    keywords=["card", "container", "box"],
)


# ============================================================
# NAVIGATION
# ============================================================

NAVBAR_JSX = """import React, { useState } from 'react';

const Navbar = ({ brand, links }) => {
  const [isOpen, setIsOpen] = useState(false);

  return (
    <nav className="navbar">
      <div className="navbar-brand">
        <span className="navbar-logo">{brand}</span>
        <button
          className="navbar-toggle"
          onClick={() => setIsOpen(!isOpen)}
        >
          <span></span>
          <span></span>
          <span></span>
        </button>
      </div>

      <div className={`navbar-menu ${isOpen ? 'is-open' : ''}`}>
        {links.map((link, index) => (
          <a key={index} href={link.url} className="navbar-link">
            {link.text}
          </a>
        ))}
      </div>
    </nav>
  );
};

export default Navbar;"""

NAVBAR_CSS = """.navbar {
  background: white;
  padding: 1rem 2rem;
  box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
  display: flex;
  justify-content: space-between;
  align-items: center;
}

.navbar-brand {
  display: flex;
  align-items: center;
  gap: 1rem;
}

.navbar-logo {
  font-size: 1.5rem;
  font-weight: bold;
  color: #3b82f6;
}

.navbar-toggle {
  display: none;
  flex-direction: column;
  background: none;
  border: none;
  cursor: pointer;
  padding: 4px;
}

.navbar-toggle span {
  width: 25px;
  height: 3px;
  background: #374151;
  margin: 2px 0;
  transition: 0.3s;
}

.navbar-menu {
  display: flex;
  gap: 2rem;
  align-items: center;
}

.navbar-link {
  text-decoration: none;
  color: #374151;
  font-weight: 500;
  transition: color 0.2s ease;
}

.navbar-link:hover {
  color: #3b82f6;
}

@media (max-width: 768px) {
  .navbar-toggle {
    display: flex;
  }

  .navbar-menu {
    display: none;
    position: absolute;
    top: 100%;
    left: 0;
    right: 0;
    background: white;
    flex-direction: column;
    padding: 1rem;
    box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
  }

  .navbar-menu.is-open {
    display: flex;
  }
}"""

NAVBAR_TEMPLATE = ComponentTemplate(
    id="navbar",
    name="Navbar",
    category=TemplateCategory.NAVIGATION,
    artifact=Artifact(jsx=NAVBAR_JSX, css=NAVBAR_CSS),
    keywords=["nav", "header", "menu", "navigation"],
)


# ============================================================
# CATALOG
# ============================================================

TEMPLATE_CATALOG = [
    CAR_TEMPLATE,
    BUTTON_TEMPLATE,
    CARD_TEMPLATE,
    NAVBAR_TEMPLATE,
]


def register_all_templates(registry: TemplateRegistry) -> None:
    """Register all templates from the catalog, in priority order"""
    for template in TEMPLATE_CATALOG:
        registry.register(template)
