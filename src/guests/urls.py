RSVP_PAGE_URL = "/rsvp"
FIND_BY_ID_URL = "/rsvp/findById"
FIND_BY_LAST_NAME_URL = "/rsvp/findByLastName"
SUBMIT_RSVP_URL = "/rsvp/submit"
