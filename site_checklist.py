from dataclasses import dataclass


@dataclass(frozen=True)
class Check:
    selector: str
    label: str


# Landmarks the page must carry, in the order they are reported
CHECKS = (
    Check(".nav", "Navigation"),
    Check(".hero", "Hero section"),
    Check("#what-we-build", "What We Build section"),
    Check("#featured-products", "Featured Products section"),
    Check("#our-approach", "Our Approach section"),
    Check("#how-we-work", "How We Work section"),
    Check("#transparency", "Transparency section"),
    Check("#about", "About section"),
    Check("#founder", "Founder section"),
    Check("#contact", "Contact section"),
    Check("footer", "Footer"),
)

# Checked after the counts below
CONTACT_FORM = Check("#contact-form", "Contact form")
MOBILE_MENU_BUTTON = Check(".mobile-menu-btn", "Mobile menu button")

# Informational only
IMAGES_SELECTOR = "img"
NAV_LINKS_SELECTOR = ".nav-links a"
