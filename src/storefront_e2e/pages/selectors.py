"""Selector expressions for every page, one mapping per page.

These strings are coupled to one version of the target markup. When the
markup changes, review the mapping for the affected page here rather than
hunting through page methods. Entries containing ``{name}``-style fields are
templates; page methods format them and build a fresh locator per call.
"""

# =============================================================================
# Storefront
# =============================================================================

HOME = {
    # Header
    "logo": "#logo",
    "search_input": '#search input[name="search"]',
    "search_button": "#search button",
    "cart_button": "#cart",
    "cart_count": "#cart-total",
    "my_account_dropdown": ".dropdown-toggle",
    "login_link": 'a:text("Login")',
    "register_link": 'a:text("Register")',
    "wishlist_link": "#wishlist-total",
    # Top menu
    "desktops_menu": 'a:text("Desktops")',
    "laptops_notebooks_menu": 'a:text("Laptops & Notebooks")',
    "components_menu": 'a:text("Components")',
    "tablets_menu": 'a:text("Tablets")',
    "software_menu": 'a:text("Software")',
    "phones_pdas_menu": 'a:text("Phones & PDAs")',
    "cameras_menu": 'a:text("Cameras")',
    "mp3_players_menu": 'a:text("MP3 Players")',
    "category_link": 'a:text("{name}")',
    # Featured products
    "featured_products_section": "#content .row",
    "product_cards": ".product-thumb",
    "add_to_cart_buttons": 'button[onclick*="cart.add"]',
    "add_to_wishlist_buttons": 'button[onclick*="wishlist.add"]',
    "product_names": ".product-thumb h4 a",
    "product_prices": ".product-thumb .price",
    # Banner
    "banner_slider": "#slideshow0",
    "slider_next_button": ".swiper-button-next",
    "slider_prev_button": ".swiper-button-prev",
}

LOGIN = {
    "email_input": "#input-email",
    "password_input": "#input-password",
    "login_button": 'input[type="submit"]',
    "forgot_password_link": 'a:text("Forgotten Password")',
    "register_link": 'a:text("Continue")',
    "error_message": ".alert-danger",
    "email_error": "#input-email-error",
    "password_error": "#input-password-error",
    "success_message": ".alert-success",
    "remember_me_checkbox": 'input[name="remember"]',
}

REGISTER = {
    "first_name_input": "#input-firstname",
    "last_name_input": "#input-lastname",
    "email_input": "#input-email",
    "telephone_input": "#input-telephone",
    "password_input": "#input-password",
    "confirm_password_input": "#input-confirm",
    "newsletter_checkbox": 'input[name="newsletter"]',
    "privacy_policy_checkbox": 'input[name="agree"]',
    "continue_button": 'input[type="submit"]',
    "back_button": 'a:text("Back")',
    "error_message": ".alert-danger",
    "field_error": "#input-{field}-error",
    "success_message": ".alert-success",
}

PRODUCT = {
    # Product information
    "product_name": "h1",
    "product_price": ".price-new, .price",
    "product_description": "#tab-description",
    "thumbnail_images": ".thumbnails img",
    # Purchase options
    "quantity_input": "#input-quantity",
    "add_to_cart_button": "#button-cart",
    "add_to_wishlist_button": 'button[onclick*="wishlist.add"]',
    "compare_button": 'button[onclick*="compare.add"]',
    "product_options": ".form-group",
    "option_selects": 'select[name*="option"]',
    "option_checkboxes": 'input[type="checkbox"][name*="option"]',
    "option_text_inputs": 'input[type="text"][name*="option"]',
    "option_select": 'select[name="{name}"]',
    "option_input": 'input[name="{name}"]',
    # Reviews
    "reviews_tab": 'a[href="#tab-review"]',
    "review_form": "#form-review",
    "review_name_input": "#input-name",
    "review_text_input": "#input-review",
    "review_rating_inputs": 'input[name="rating"]',
    "submit_review_button": "#button-review",
    "review_list": "#tab-review .review-list",
    "review_items": ".review-item",
    # Related products
    "related_products_section": ".product-related",
    "related_product_cards": ".product-related .product-thumb",
    # Breadcrumb
    "breadcrumb_home": '.breadcrumb a:text("Home")',
    "breadcrumb_links": ".breadcrumb a",
    "breadcrumb_product": ".breadcrumb .active",
    # Messages
    "success_message": ".alert-success",
    "error_message": ".alert-danger",
}

CART = {
    # Item rows
    "cart_items": ".table-responsive tbody tr",
    "cart_item_names": ".table-responsive tbody tr td.text-left a",
    "cart_item_prices": ".table-responsive tbody tr td.text-right:nth-child(3)",
    "cart_item_quantities": '.table-responsive tbody tr td input[type="text"]',
    "cart_item_totals": ".table-responsive tbody tr td.text-right:nth-child(5)",
    "remove_buttons": '.table-responsive tbody tr td button[onclick*="cart.remove"]',
    "row_name_link": "td.text-left a",
    "row_quantity_input": 'td input[type="text"]',
    # Summary
    "cart_subtotal": ".table-responsive tbody tr:last-child td.text-right:nth-child(2)",
    "cart_total": ".table-responsive tbody tr:last-child td.text-right:nth-child(3)",
    "checkout_button": 'a:text("Checkout")',
    "continue_shopping_button": 'a:text("Continue Shopping")',
    "update_cart_button": 'button[onclick*="cart.update"]',
    # Empty cart
    "empty_cart_message": 'p:text("Your shopping cart is empty!")',
    "empty_cart_continue_button": 'a:text("Continue")',
    # Coupon and voucher
    "coupon_input": "#input-coupon",
    "apply_coupon_button": "#button-coupon",
    "voucher_input": "#input-voucher",
    "apply_voucher_button": "#button-voucher",
    # Shipping estimate
    "country_select": "#input-country",
    "region_select": "#input-zone",
    "postcode_input": "#input-postcode",
    "get_quotes_button": "#button-quote",
}

# =============================================================================
# Form widgets
# =============================================================================

SIDEBAR = {
    "menu_item": 'span:text("{name}")',
}

TEXT_BOX = {
    "user_name_input": "#userName",
    "user_email_input": "#userEmail",
    "current_address_input": "#currentAddress",
    "permanent_address_input": "#permanentAddress",
    "submit_button": "#submit",
    "output": "#output",
    "output_name": "#name",
    "output_email": "#email",
}

CHECK_BOX = {
    "expand_button": ".rct-collapse-btn",
    "expand_all_button": 'button[title="Expand all"]',
    "node_label": 'span:text("{label}")',
    "result": "#result",
}

RADIO_BUTTON = {
    "option": 'input[name="like"][value="{value}"]',
    "selected_text": ".text-success",
}

PRACTICE_FORM = {
    "first_name_input": "#firstName",
    "last_name_input": "#lastName",
    "email_input": "#userEmail",
    "gender_radio": 'input[name="gender"][value="{gender}"]',
    "mobile_input": "#userNumber",
    "submit_button": "#submit",
    "submission_modal": ".modal-content",
    "field": "#{field}",
}

DATE_PICKER = {
    "month_year_input": "#datePickerMonthYearInput",
    "selected_day": ".react-datepicker__day--selected",
}

SELECT_MENU = {
    "old_style_select": "#oldSelectMenu",
}

ALERTS = {
    "alert_button": "#alertButton",
    "confirm_button": "#confirmButton",
    "confirm_result": "#confirmResult",
}
