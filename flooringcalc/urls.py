from django.contrib.sitemaps.views import sitemap
from django.urls import include, path

from calculators.sitemaps import CalculatorSitemap, StaticPageSitemap
from calculators.views import RobotsTxtView

sitemaps = {
    "static": StaticPageSitemap,
    "calculators": CalculatorSitemap,
}

urlpatterns = [
    path("", include("pages.urls")),
    path("", include("calculators.urls")),
    path("sitemap.xml", sitemap, {"sitemaps": sitemaps}, name="django.contrib.sitemaps.views.sitemap"),
    path("robots.txt", RobotsTxtView.as_view(), name="robots_txt"),
]
