from django.contrib.sitemaps import Sitemap
from django.urls import reverse

from .registry import get_calculators


class StaticPageSitemap(Sitemap):
    changefreq = "weekly"
    priority = 1.0

    def items(self):
        return ["home", "calculator_list"]

    def location(self, item):
        return reverse(item)


class CalculatorSitemap(Sitemap):
    changefreq = "monthly"
    priority = 0.8

    def items(self):
        return get_calculators()

    def location(self, item):
        return item.route
