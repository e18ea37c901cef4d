"""
Marketplace App - Buyers, Buyer Requests and Offers

Buyers post what they need (form, cultivar, quantity, destination); farmers
offer batches against open requests; accepting an offer closes the request.

Key Components:
- Models: Buyer, BuyerRequest, Offer
- Services: post_request, make_offer, accept_offer, find_matching_batches
- API: /api/marketplace/
- Pages: /buyers/new/, /requests/
"""
