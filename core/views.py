from django.shortcuts import render

from pages.models import Page


def home(request):
    pages = Page.objects.filter(published=True)
    return render(request, 'home.html', {'pages': pages})
